#!/usr/bin/env python3
"""
Setup script for locale-shell

Installs the backend packages (shared, i18n_api, app_shell) from backend/.
"""

from setuptools import setup, find_packages

setup(
    name="locale-shell",
    version="0.1.0",
    description="Translation bootstrap shell with a development mock i18n API",
    package_dir={"": "backend"},
    packages=find_packages(
        where="backend",
        include=["shared", "shared.*", "i18n_api", "i18n_api.*", "app_shell", "app_shell.*"],
    ),
    python_requires=">=3.9",
    install_requires=[
        # 🚀 Web Framework
        "fastapi>=0.104.1",
        "uvicorn[standard]>=0.24.0",
        "httpx>=0.25.2",

        # 📋 Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",

        # 📝 Logging
        "python-json-logger>=2.0.7,<4",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "locale-shell=app_shell.main:main",
        ],
    },
)
