"""
Setup file.
"""


from setuptools import find_packages, setup

KEYWORDS = "go llgo gccgo compiler toolchain build staging"


if __name__ == "__main__":
    setup(
        name="llstage",
        version="0.1.0",
        description="Pre-compile staging layer for the llgo build driver",
        keywords=KEYWORDS,
        python_requires=">=3.9",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=["tqdm"],
        extras_require={"test": ["pytest"]},
        entry_points={"console_scripts": ["llstage=llstage.cli:main"]},
    )
