from setuptools import setup, find_packages

setup(
    name="bearmigrate",
    version="0.1.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[
        "click>=8.1.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0.1",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bearmigrate=bearmigrate.cli:main",
        ],
    },
    python_requires=">=3.10",
)
