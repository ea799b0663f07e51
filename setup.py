#!/usr/bin/env python
"""
sentry-bridge
=============

sentry-bridge turns plain Python mappings describing events, breadcrumbs,
users and requests into `Sentry <https://sentry.io/>`_ events, and sends them
through the official ``sentry-sdk`` client.
"""

from setuptools import setup, find_packages
import re
import ast


_version_re = re.compile(r'VERSION\s+=\s+(.*)')

with open('sentry_bridge/__init__.py', 'rb') as f:
    version = str(ast.literal_eval(_version_re.search(
        f.read().decode('utf-8')).group(1)))


install_requires = [
    'sentry-sdk>=2.11.0',
]

tests_require = [
    'mock',
    'pytest',
]


setup(
    name='sentry-bridge',
    version=version,
    author='Sentry',
    author_email='hello@getsentry.com',
    description='Builds Sentry events from plain mappings',
    long_description=__doc__,
    packages=find_packages(exclude=("tests", "tests.*",)),
    zip_safe=False,
    python_requires='>=3.8',
    extras_require={
        'tests': tests_require,
    },
    license='BSD',
    install_requires=install_requires,
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'sentry-bridge = sentry_bridge.scripts.runner:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python',
        'Topic :: Software Development',
    ],
)
