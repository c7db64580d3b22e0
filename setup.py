#!/usr/bin/env python
from setuptools import setup
setup(
    name='parseobjects',
    version='1.0',
    description='Parse REST API client with subclassable objects and sessions',
    author='Six Apart Ltd.',
    author_email='python@sixapart.com',

    packages=['parseobjects'],
    provides=['parseobjects'],
    install_requires=['simplejson>=2.0.0', 'httplib2>=0.4.0'],
    extras_require={
        'test': ['mock', 'pytest'],
    },
)
