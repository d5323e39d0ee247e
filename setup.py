from setuptools import setup, find_packages

setup(
    name='kimaiPy',
    version='0.1.0',
    description='A command line client for starting, stopping and listing Kimai 2 measurements.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
        'prompt_toolkit',
    ],
    entry_points={
        'console_scripts': [
            'kimaipy=kimaipy.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['kimaipy.env.example'],
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
