import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="polyoptics",
    version="0.1.0",
    author="polyoptics developers",
    description="Polynomial optics lens models and a spectral lens renderer",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['geometric optics', 'polynomial optics', 'lens aberrations',
              'ray transfer', 'spectral rendering', 'depth of field'],
    install_requires=[
        "opticalglass",
        "numpy>=1.17.0",
        "matplotlib>=2.2.3",
        "json_tricks>=3.12.1",
        "pandas>=0.23.4",
        "attrs>=18.1.0",
        "imageio>=2.9.0",
        ],
    extras_require={
        'test': ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'polyoptics = polyoptics.render.app:main',
        ],
    },
)
