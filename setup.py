from setuptools import find_packages, setup

setup(
    name='akeneo-connector-cli',
    version='1.0.0',
    description='Command-line runner for Akeneo connector import jobs',
    packages=find_packages(exclude=[
        'akeneo_connector.test',
        'akeneo_connector.test.*',
    ]),
    python_requires='>=3.8',
    install_requires=[
        'python-dateutil',
        'simplejson',
    ],
    extras_require={
        'test': [
            'mock',
            'pytest',
        ],
    },
    entry_points={
        "console_scripts": [
            "akeneo-connector = akeneo_connector.main:main",
        ],
    }
)
