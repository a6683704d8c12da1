[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emu6502"
version = "0.1.0"
description = "Groundwork for a MOS 6502 emulator: CPU state, memory dump, status flags and opcode table"
requires-python = ">=3.10"
dependencies = []
keywords = ["6502", "emulator", "cpu", "opcode", "retro"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
emu6502 = "emu6502.emulator:main"

[tool.hatch.build.targets.wheel]
packages = ["emu6502"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
