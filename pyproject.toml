[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gammaray"
version = "0.1.0"
description = "A small game engine core: events, layers, input state, an entity-component scene and resource-embedding tools"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "game engine",
    "entity component system",
    "events",
    "layers",
    "shaders",
    "code generation",
]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gammaray-bin2c = "gammaray.bin2c:main"
gammaray-shader2c = "gammaray.shader2c:main"

[tool.hatch.build.targets.wheel]
packages = ["gammaray"]

[tool.hatch.build.targets.sdist]
include = [
    "gammaray",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
