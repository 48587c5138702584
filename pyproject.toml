[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dtlswire"
version = "0.1.0"
description = "Wire-format types for DTLS: content types, curve types, block padding and hello extensions"
requires-python = ">=3.10"
dependencies = []
keywords = ["dtls", "tls", "webrtc", "extensions", "padding", "wire-format"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dtlswire"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
