#!/usr/bin/env python

from setuptools import setup

setup(name='fretatlas',
      version='1.0',
      description='A python library for identifying, generating and displaying chords and scales on the guitar fretboard',
      author='The fretatlas developers',
      install_requires=['numpy'],
      extras_require={
        'dev': [ 'ipdb' ],
        'test': [ 'pytest' ],
      },
      package_dir = {'fretatlas': 'src'},
      packages = ['fretatlas', 'fretatlas.config', 'fretatlas.test'],
     )
