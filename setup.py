from setuptools import find_packages, setup


def read_requirements():
    with open("requirements.txt") as f:
        return [line for line in f.read().splitlines() if line.strip()]


setup(
    name="vbox-search-provider",
    version="0.3.0",
    description="GNOME Shell search provider for VirtualBox machines",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: POSIX :: Linux",
    ],
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pygobject-stubs",
        ],
        "tests": [
            "pytest",
        ],
    },
    scripts=["scripts/vbox-search-provider"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    data_files=[
        (
            "share/gnome-shell/search-providers",
            ["data/io.github.vboxsearch.SearchProvider.ini"],
        ),
        (
            "share/dbus-1/services",
            ["data/io.github.vboxsearch.SearchProvider.service"],
        ),
    ],
    include_package_data=True,
)
