from os import path

from setuptools import setup, find_packages

here = path.abspath(path.dirname(__file__))

version = {}
with open(path.join(here, "fluentdocker", "scripts", "version.py"), encoding="utf-8") as f:
    exec(f.read(), version)

with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='fluentdocker',
    description='Fluent builder for Dockerfiles',
    long_description=long_description,
    version=version["version"],
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'click',
        'rainbow_logging_handler',
        'pyyaml'
    ],
    tests_require=['pytest'],
    extras_require={
        'test': ['pytest']
    },
    license='GPLv3',
    platforms='linux',
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: POSIX :: Linux",
        "Topic :: Software Development :: Build Tools",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        'Intended Audience :: Developers',
    ],
    entry_points='''
        [console_scripts]
        fluentdocker=fluentdocker.scripts.cli:cli_with_error_catching
    '''
)
