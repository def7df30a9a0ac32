import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pynumeric",
    version="0.1.0",
    description="Root finding, quadrature, finite differences and dense "
                "linear solvers for real scalar functions.",
    include_package_data=True,
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest', 'scipy'],
        'doc': ['sphinx', 'pydata-sphinx-theme'],
    },
    keywords='numerical methods root finding quadrature gaussian '
             'elimination',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pynumeric', 'pynumeric.*']),
    python_requires='>=3.9',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
