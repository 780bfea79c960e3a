#!/usr/bin/env python3
"""
Setup script for seohtml, for environments that install with plain setuptools.
"""

import sys

from setuptools import find_packages, setup

# Read the pyproject.toml to get the package metadata
try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    project = pyproject_data["project"]
    authors = project.get("authors", [])

    setup(
        name=project["name"],
        version=project["version"],
        description=project["description"],
        author=authors[0]["name"] if authors else None,
        license=project.get("license", {}).get("text"),
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=project.get("dependencies", []),
        extras_require=project.get("optional-dependencies", {}),
        entry_points={
            "console_scripts": [f"{name}={target}" for name, target in project.get("scripts", {}).items()]
        },
        python_requires=project.get("requires-python", ">=3.12,<4.0"),
        include_package_data=True,
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
