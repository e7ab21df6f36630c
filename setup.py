from setuptools import setup, find_packages

exec(open("fancy/__init__.py").read().split("\n\n")[0])

setup(
    name="fancy",
    version=__version__,
    description="Print colored terminal output using an inline markup",
    long_description=open("README.rst", "r").read(),
    long_description_content_type="text/x-rst",
    license="MIT",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Terminals",
        "License :: OSI Approved :: MIT License",
        "Environment :: Console",
        "Programming Language :: Python :: 3.9",
    ],
    keywords=[
        "ansi",
        "color",
        "terminal",
        "markup",
    ],
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.9, <4",
    install_requires=[
        "wcwidth",
        "appdirs",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "fancy = fancy.__main__:main",
        ],
    },
)
