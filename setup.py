from setuptools import setup, find_packages

setup(
    name="tripleForge",
    version="0.1.0",
    description="Triple graph engine: ontology lowering, graph codecs and RDFS entailment",
    author="Your Name",
    author_email="you@example.com",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "requests>=2.31.0",
        "fastapi>=0.100.0",
        "pydantic>=2.0",
        "uvicorn>=0.23.0",
        "rdflib>=6.2.0",
        "PyYAML>=6.0",
        "tabulate>=0.8.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "requests-mock>=1.11",
            "pytest-socket>=0.6",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "tripleForge=tripleForge.cli:main",
            "tripleForge-api=service.api_server.server:main",
        ],
    },
    license="MIT",
)
