from setuptools import setup, find_packages

setup(
    name = 'librarytree',
    description = 'Print the tree of shared library dependencies of ELF files',
    version = '0.1',
    license = 'GPL-3.0',
    packages = find_packages(exclude=['test', 'test.*']),
    zip_safe = False,
    python_requires = '>=3.7',
    install_requires = [],
    extras_require = {
        'test': ['pytest'],
    },
    entry_points = {
        'console_scripts': [
            'librarytree = librarytree.runner:main',
        ],
    },
)
