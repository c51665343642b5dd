[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dreamnet"
version = "0.1.0"
description = "Small neural-network operators and training examples built on NumPy"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "neural-network",
    "deep-dream",
    "regression",
    "operators",
    "gradients",
    "numpy",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dreamnet-regression = "dreamnet.regression:main"
dreamnet-intro = "dreamnet.intro:main"

[tool.hatch.build.targets.wheel]
packages = ["dreamnet"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
