[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bonobo"
version = "0.1.0"
description = "Backend-independent helpers for interactive 3D graphics: logging, a log view, TRS transforms, input state tracking, an FPS camera and graphics debug-message routing."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["graphics", "3d", "camera", "transform", "input", "logging", "opengl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bonobo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
