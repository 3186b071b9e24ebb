from setuptools import setup, find_packages

install_reqs = open('requirements.txt').read().splitlines()
long_desc = """
A replay launcher for FAForever. Opens native .scfareplay files as they are,
unpacks legacy .fafreplay files into a temporary raw replay, and starts
ForgedAlliance (optionally through a wrapper) to watch them.
"""


setup(
    name="faf_replay_launcher",
    version='0.1.0',
    description="Replay launcher for FAForever",
    long_description=long_desc,
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    keywords="FAForever replay launcher",
    license="GPL3",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "faf_replay_launcher = replaylauncher.main:main",
            "faf_replay_extract = replaylauncher.main:extract_main",
        ],
    },
    install_requires=install_reqs,
    extras_require={
        "test": ["pytest", "pytest-mock"],
    },
)
