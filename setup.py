"""Setup script for treeset."""
from setuptools import setup, find_packages  # type: ignore

setup(
    name='treeset',
    version='0.1.0',
    description='Ordered sets sorted by a pluggable comparator, with merge-based set algebra',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='ordered set sorted comparator',
    packages=find_packages(),  # type: ignore
    python_requires='>=3.12',
    install_requires=[
        'sortedcontainers>=2.4.0,<3',
        'typing-extensions>=4',
    ],
    extras_require={
        'test': ['coverage>=7', 'hypothesis>=6', 'pytest>=7'],
        'dev': ['axblack==20220330', 'mypy>=1.1.1', 'pre-commit>=2.6.0,<3'],
    },
    entry_points={'console_scripts': ['treeset=treeset.__main__:main']},
)
