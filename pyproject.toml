[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sixkit"
version = "0.1.0"
description = "A teaching-kernel toolkit: Sv39 address arithmetic, ELF headers, a small shell parser and classic user programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "kernel",
    "risc-v",
    "sv39",
    "elf",
    "shell",
    "grep",
    "malloc",
    "teaching",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System Kernels",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sixkit-grep = "sixkit.grep:main"
sixkit-text = "sixkit.textutils:main"
sixkit-files = "sixkit.fileutils:main"

[tool.hatch.build.targets.wheel]
packages = ["sixkit"]

[tool.pytest.ini_options]
addopts = "-ra"
