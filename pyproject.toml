[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadguide"
version = "0.1.0"
description = "Rotation and statistics helpers, joint command and state records, wire formats and control-cycle logic for quadruped robots and their joint actuators"
requires-python = ">=3.10"
keywords = ["robotics", "quadruped", "legged robot", "motor control", "kinematics", "wire format"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "numpy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["quadguide"]

[tool.pytest.ini_options]
addopts = "-ra"
