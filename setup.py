from setuptools import setup, find_packages

setup(
    name="faultline",
    version="0.1.0",
    description="Report uncaught errors from console applications through a message template",
    packages=find_packages(include=["faultline", "faultline.*"]),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "faultline=faultline.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
