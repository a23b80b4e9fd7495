from setuptools import setup, find_packages

setup(
    name="codex-devshell",
    version="0.1.0",
    description="Development launcher for the Codex desktop shell (platform-aware CLI resolution)",
    packages=find_packages(include=["codex_devshell", "codex_devshell.*"]),
    install_requires=[
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "codex-devshell=codex_devshell.runtime.cli:main",
        ],
    },
    python_requires=">=3.9",
)
