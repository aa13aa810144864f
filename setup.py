from setuptools import find_packages, setup


extras_require = {}

extras_require["test"] = [
    'pytest>=7.4.0'
]

extras_require["all"] = [
    *extras_require["test"],
]


setup(
    name='westfax',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='MIT',
    description='A Python client for the WestFax REST API',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    install_requires=[
        'requests>=2.31.0,<3.0',
        'pydantic>=2.0,<3.0',
        'python-dotenv>=1.0.0,<2.0'
    ],
    extras_require=extras_require,
    python_requires=">=3.10"
)
