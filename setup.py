from setuptools import setup, find_packages
setup(
    name='mobile-buildtools',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    package_data={
        'mobile_buildtools': [
            'logging.ini',
        ],
    },
    description='Environment and secrets resolution for mobile app build pipelines.',
    author='Your Name',
    author_email='youremail@example.com',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'mobile-buildtools = mobile_buildtools.cli:main',
        ],
    },
)
