#!/usr/bin/env python

from setuptools import setup

with open('injectivemap/version.txt') as v:
    version = v.read().strip()

classifiers = '''
Development Status :: 3 - Alpha
License :: Public Domain
Programming Language :: Python :: 3
'''

setup(name='py-injectivemap',
      version=version,
      description='A dict with unique keys and unique values',
      author='Toby Burress',
      author_email='kurin@delete.org',
      classifiers=[c for c in classifiers.split('\n') if c],
      package_data={'': ['version.txt']},
      packages=['injectivemap'],
      python_requires='>=3.7',
      install_requires=[],
      extras_require={'test': ['pytest', 'mock']})
