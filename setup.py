import codecs
from os import path
from setuptools import setup, find_packages


def long_description():
    """Returns the content of the readme."""
    this_directory = path.abspath(path.dirname(__file__))
    with codecs.open(
        path.join(this_directory, "README.md"), encoding="utf-8"
    ) as f:
        return f.read()


setup(
    name="conllio",
    version="0.1.0",
    description="Reading, validation and writing of CoNLL dependency treebanks",
    long_description_content_type="text/markdown",
    long_description=long_description(),
    include_package_data=True,
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.6",
    install_requires=["networkx", "pydot"],
    extras_require={"test": ["pytest"]},
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Linguistic",
    ],
    keywords="conll conllu treebank dependency-parsing nlp",
)
