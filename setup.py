from setuptools import setup, find_packages

with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='asset-chaincode',
    version='0.1.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    include_package_data=True,
    install_requires=[
        'loguru==0.7.3',
        'prometheus_client==0.22.1',
        'pydantic==2.11.7',
        'pydantic-settings==2.10.1',
        'python-dotenv==1.1.0',
    ],
    extras_require={
        'test': ['hypothesis==6.135.0', 'pytest==8.4.1', 'pytest-mock==3.14.1'],
    },
    entry_points={
        'console_scripts': [
            'asset-chaincode=asset_chaincode.cli:main',
        ],
    },
    author='Yuan ',
    author_email='tommot20077@gmail.com',
    description='A key/value asset contract with a local host, file-backed ledger and CLI.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    python_requires='>=3.10',
)
