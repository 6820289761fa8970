from setuptools import find_packages, setup


VALID_PY_VERSIONS = [
    f"Programming Language :: Python :: 3.{v}" for v in range(9, 13)
]

setup(
    name="typed_ansi",
    setup_requires=["setuptools_scm"],
    use_scm_version={
        "write_to": "typed_ansi/_version.py",
        "write_to_template": 'version = "{version}"\n',
        "fallback_version": "0.1.0",
    },
    description="typed ANSI colours and text styling for terminals",
    long_description=open("README.md", "r").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["colorama>=0.4.6"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        *VALID_PY_VERSIONS,
    ],
    python_requires=">=3.9",
)
