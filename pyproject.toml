[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fehkit"
version = "0.1.0"
description = "Image viewer and wallpaper layout logic: zoom and placement maths, background scripts and window-manager IPC messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["image-viewer", "wallpaper", "background", "zoom", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fehkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
