from setuptools import setup, Extension, find_packages
from Cython.Build import cythonize
import numpy as np

extensions = [
    Extension(
        name="sernalign._cython.sernalign_dp",
        sources=["sernalign/_cython/sernalign_dp.pyx"],
        include_dirs=[np.get_include()],
    )
]

ext_modules = cythonize(extensions, language_level=3)
# Without a working compiler the pure-Python core is used instead
for ext in ext_modules:
    ext.optional = True

setup(
    name="sernalign",
    version="0.1.0",
    description="Edit alignment of RNA secondary structures encoded as structural sequences",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    ext_modules=ext_modules,

    install_requires=[
        "numpy"
    ],
    extras_require={
        "plot": [
            "matplotlib",
            "seaborn",
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
        ],
        "all": [
            "matplotlib",
            "seaborn",
            "pytest>=7.0",
            "pytest-cov",
        ]
    },
    entry_points={
        "console_scripts": [
            "sernalign=sernalign.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.9',
)
