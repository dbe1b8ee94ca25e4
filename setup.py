from setuptools import find_packages, setup


extras_require = {}

extras_require["data-neo4j"] = [
    'neo4j>=5.14,<6.0'
]

extras_require["data-surreal"] = [
    'surrealdb>=1.0.4,<1.1'
]

extras_require["data"] = [
    *extras_require["data-neo4j"],
    *extras_require["data-surreal"],
]

extras_require["test"] = [
    *extras_require["data"],
    'pytest>=7.4',
]

extras_require["all"] = [
    *extras_require["data"],
]


setup(
    name='orgapi',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='MIT',
    description='Read-only public API serving organisations assembled from a graph store',
    entry_points={
        'console_scripts': [
            'orgapi = orgapi.cli:main',
        ],
    },
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    install_requires=[
        'Flask>=2.3,<4.0',
        'neo4j>=5.14,<6.0',
        'pydantic>=2.0,<3.0',
        'pydantic-settings>=2.0,<3.0',
        'python-dotenv>=1.0.0,<2.0'
    ],
    extras_require=extras_require,
    python_requires=">=3.10"
)
