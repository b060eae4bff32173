from setuptools import find_packages, setup

setup(
    name="twang",
    version="0.8.0",
    description="Sample-by-sample waveform algebra and synthesizer for audio signals.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "librosa",
        "soundfile",
        "click",
        "tabulate",
        "pydantic>=2",
        "toml",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "twang=twang.cli.main:cli",
        ],
    },
)
