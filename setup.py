from setuptools import setup, find_packages
setup(
    name='stream-build-config',
    version='6.5.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    description='Typed build configuration (SDK levels, library version, publishing group) with invoke tasks.',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
)
