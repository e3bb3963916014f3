from setuptools import setup

with open("README.md") as f:
    readme = f.read()

about = {}
with open("route_planner/_version.py") as f:
    exec(f.read(), about)

setup(
    name=about["__title__"],
    version=about["__version__"],
    description=about["__description__"],
    long_description=readme,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    author_email=about["__author_email__"],
    url=about["__url__"],
    license=about["__license__"],
    packages=[
        "route_planner",
        "route_planner.maps",
        "route_planner.maps.a_star",
        "route_planner.planning",
        "route_planner.observer",
        "route_planner.example_sqlite_map",
        "route_planner.example_memory_map",
    ],
    install_requires=[
        "geographiclib",
        "numpy",
        "scipy",
        "shapely",
    ],
    extras_require={
        "test": ["pytest"],
    },
    test_suite="tests",
    python_requires=">=3.8",
    classifiers=[
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
)
