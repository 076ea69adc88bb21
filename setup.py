from setuptools import setup, find_packages

setup(
    name="claude-viz",
    version="1.0.0",
    description="claude-viz - Agent, skill and command dependency graphs for Claude Code projects",
    author="Your Name",
    packages=find_packages(include=["claude_viz", "claude_viz.*"]),
    include_package_data=True,
    install_requires=[
        # Core data modeling and validation
        "pydantic>=2.0.0",

        # Environment variables
        "python-dotenv>=1.0.0",

        # Graph analysis (for the stats command)
        "networkx>=3.0",

        # CLI and rich output
        "typer>=0.9.0",
        "rich>=13.0.0",

        # YAML support for config files
        "pyyaml>=6.0.0",

        # Visualizer server
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            # fastapi.testclient transport
            "httpx>=0.25.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "claude-viz = claude_viz.cli:main",
        ],
    },
    python_requires=">=3.11",
    package_dir={"": "."},
)
