"""A setuptools based setup module.
See:
https://packaging.python.org/guides/distributing-packages-using-setuptools/
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='flatkeys',
    version='1.0.0',
    description='flatten nested dictionaries and lists into formatted keys and back',
    long_description=long_description,
    long_description_content_type='text/markdown',

    # Classifiers help users find your project by categorizing it.
    # For a list of valid classifiers, see https://pypi.org/classifiers/
    classifiers=[  # Optional
        'Development Status :: 5 - Production/Stable',
        "Intended Audience :: Developers",
        "Operating System :: POSIX",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS :: MacOS X",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.8',
        "Programming Language :: Python :: 3 :: Only",
    ],
    packages=find_packages(exclude=['tests']),
    keywords="flatten unflatten nested dict json keys",
    python_requires='>=3.8, <4',
    entry_points={
        'console_scripts': [
            'flatkeys = flatkeys.cli:main'
        ]
    },
    install_requires=[
        'pydash'
    ],
    extras_require={
        'dev': ['pytest', 'coveralls', 'pylint', 'coverage'],
    },
)
