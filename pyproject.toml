[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "halo_plonky"
version = "0.1.0"
description = "Poseidon permutation over BN254 applied to Goldilocks limbs, with Goldilocks field, quadratic extension, sponge hasher and Merkle proof checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["poseidon", "goldilocks", "bn254", "plonky2", "merkle", "fri", "zero-knowledge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["halo_plonky"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
