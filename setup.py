#!/usr/bin/env python

from setuptools import setup, find_packages
import roadmap

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name='roadmap',
    version=roadmap.VERSION,
    description='Data management plan tool: organisation administration and Shibboleth sign in',
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords='data-management-plan research-data shibboleth',
    license='GNU Affero General Public License v3 or later (AGPLv3+)',
    python_requires='>=3.8',
    packages=find_packages(include=['roadmap', 'roadmap.*']),
    install_requires=[
        'Django>=4.2,<6',
        'crispy-bootstrap4>=2022.1',
        'django-crispy-forms>=2.0',
        'django-environ>=0.9.0',
        'django-model-utils>=4.3.1',
        'django-settings-export>=1.2.1',
        'django-simple-history>=3.2.0',
        'django-split-settings>=1.2.0',
        'requests>=2.28.2',
    ],
    extras_require={
        'test': [
            'factory-boy>=3.2.1',
            'Faker>=11.3.0',
            'pytest',
            'pytest-django',
        ],
    },
    entry_points={
        'console_scripts': [
            'roadmap = roadmap:manage',
        ],
    },
    include_package_data = True,
    classifiers=[
        'Programming Language :: Python :: 3',
        'Framework :: Django :: 4.2',
        'License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)',
        'Topic :: Internet :: WWW/HTTP :: WSGI :: Application',
    ]
)
