[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "kanetkb"
version = "0.1.0"
description = "Configuration tools and a key-matrix and report model for a multilingual USB HID keyboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["keyboard", "usb", "hid", "keymap", "configuration", "languages"]
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
    "Topic :: System :: Hardware :: Universal Serial Bus (USB) :: Human Interface Device (HID)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kanetkb = "kanetkb.cli:main"

[tool.setuptools.packages.find]
include = ["kanetkb*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
