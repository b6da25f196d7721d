from setuptools import find_packages, setup

setup(
    name="doyle_spiral",
    version="0.1.0",
    description="Newton-Raphson solver for the seed point of Doyle spirals",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={
        "test": ["pytest", "scipy"],
    },
)
