from setuptools import setup

setup(
    name='osmsc',
    version='0.1.0',
    author='Ian Dees',
    author_email='ian.dees@gmail.com',
    packages=['osmsc'],
    url='http://github.com/iandees/pyosm',
    license='LICENSE.txt',
    description='Converts OSM XML into normalized silicate (SC) tables.',
    long_description=open('README.md').read(),
    keywords = ['osm', 'openstreetmap', 'xml', 'silicate', 'tables'],
    install_requires=[
        'lxml',
        'numpy',
        'requests'
    ],
    extras_require={
        'test': ['pytest']
    }
)
