"""
Setup script for the crash report uploader.

This allows the uploader to be installed as a library and as a command-line tool.
"""

from setuptools import setup, find_packages

setup(
    name='crash-uploader',
    version='1.0.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'click>=8.0.0',
        'returns>=0.20.0',
        'urllib3>=2.0.0',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'crash-upload=crash_uploader.cli:cli',
        ],
    },
    python_requires='>=3.10',
)
