from setuptools import setup, find_packages

setup(
    name="proposal-extraction-service",
    version="1.0.0",
    packages=find_packages(include=["proposal_extraction_service", "proposal_extraction_service.*", "api"]),
    py_modules=["extract_document"],
    install_requires=[
        "langchain-core>=0.3.15",
        "langchain-openai>=0.2.12",
        "pydantic>=2.10.3",
        "pydantic-settings>=2.6.0",
        "python-dotenv>=1.0.1",
        "pypdf>=5.1.0",
        "python-docx>=1.1.0",
        "httpx>=0.27.0",
        "fastapi>=0.115.0",
        "uvicorn>=0.32.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "reportlab>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "extract-proposal=extract_document:main",
        ],
    },
    python_requires=">=3.11",
)
