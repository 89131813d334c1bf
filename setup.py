from setuptools import setup, find_packages

setup(
    name="newsdeck",
    version="0.1.0",
    packages=find_packages(exclude=["newsdeck.tests", "newsdeck.tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "fastapi>=0.95.0",
        "uvicorn>=0.21.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "httpx>=0.24.1",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "newsdeck=newsdeck.cli:main",
            "newsdeck-server=newsdeck.__main__:main",
        ]
    },
)
