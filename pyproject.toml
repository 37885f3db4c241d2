[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmusic"
version = "0.1.0"
description = "Seeded procedural music: scales, chords, rhythm patterns and a small sine-wave synthesizer writing WAV"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "music",
    "music-theory",
    "procedural-generation",
    "synthesizer",
    "chords",
    "scales",
    "wav",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Artistic Software",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pmusic = "pmusic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pmusic"]

[tool.hatch.build.targets.sdist]
include = ["pmusic", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
