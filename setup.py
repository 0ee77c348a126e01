from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="LazySeq",
    version=version,
    description="Lazy, composable pipelines over any enumerable source (lists, sets, dicts, generators...)",
    long_description=long_description,
    keywords=['sequence', 'lazy', 'functional', 'pipeline', 'fold', 'iterator'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=['tests', 'tests.*', 'docs', 'docs.*']),
    python_requires='>=3.6',
    extras_require={
        'tests': [
            'pytest', 'pytest-timeout', 'numpy', 'coverage']
    }
)
