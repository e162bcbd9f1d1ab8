from setuptools import find_packages, setup

# The package sources live next to their tests in tests/core/pyspec,
# the same layout the executable consensus specs use.
#
# The active preset is chosen at import time with ETH2STATE_PRESET=mainnet|minimal.

with open("tests/core/pyspec/eth2state/VERSION.txt") as f:
    version = f.read().strip()

setup(
    name="eth2state",
    version=version,
    description="Beacon state-transition core: registry, selection, exits, slashing and inactivity accounting",
    python_requires=">=3.9, <4",
    include_package_data=False,
    package_data={
        "eth2state": ["VERSION.txt", "presets/*.yaml", "configs/*.yaml"],
    },
    package_dir={
        "eth2state": "tests/core/pyspec/eth2state",
    },
    packages=["eth2state"]
    + [
        "eth2state." + pkg
        for pkg in find_packages(where="tests/core/pyspec/eth2state")
    ],
    install_requires=[
        "remerkleable>=0.1.24",
        "ruamel.yaml>=0.17.21",
        "lru-dict>=1.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
)
