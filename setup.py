#!/usr/bin/python3

from setuptools import setup, find_packages


setup(
	name='py-hyperion',
	version='0.1a1',
	author='Guillermo Rodriguez',
	author_email='guillermor@fing.edu.uy',
	package_dir={'': 'src'},
	packages=find_packages('src'),
	python_requires='>=3.11',
	install_requires=[
        'httpx',
        'msgspec',
        'requests',
	],
	extras_require={
        'test': [
            'pytest',
            'trio',
        ]
	}
)
