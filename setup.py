from setuptools import setup, find_packages


setup(
    name = "bstmap",
    version = "0.4.0",
    description = "Ordered key/payload map backed by an unbalanced binary search tree",
    packages = find_packages(exclude=["tests", "tests.*"]),
    python_requires = ">=3.7",
    install_requires = [
        "dnspython>=2.0",
        ],
    extras_require = {
        "test": [
            "pytest>=7.0",
            ],
        },
    entry_points = {
        "console_scripts": [
            "bstdemo = bstmap.demo:main",
            ],
        },
)
