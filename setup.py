from setuptools import setup, find_packages
setup(
    name='bamboohr-client',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    description='A thin Python client for the BambooHR v1 REST API.',
    author='Your Name',
    author_email='youremail@example.com',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'requests>=2.25.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'bamboohr = bamboohr_client.tasks:program.run',
        ],
        'pytest11': [
            'bamboohr_client = bamboohr_client.pytest_plugin',
        ],
    },
)
