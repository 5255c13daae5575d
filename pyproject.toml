[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernelkit"
version = "0.1.0"
description = "Reference implementations of softmax variants, vector/matrix addition and block reduction"
requires-python = ">=3.10"
dependencies = []
keywords = ["softmax", "online softmax", "reduction", "vector add", "matrix add"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kernelkit-softmax = "kernelkit.softmax:main"
kernelkit-arrays = "kernelkit.arrays:main"

[tool.hatch.build.targets.wheel]
packages = ["kernelkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
