from setuptools import setup

setup(
    name="geospec",
    version="0.1.0",
    description="Lossless conversion between GeoJSON text and typed geometry objects",
    license="BSD",
    packages=["geospec"],
    package_data={"geospec": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.18"],
    extras_require={"test": ["pytest"]},
)
