import pytest


@pytest.fixture
def polygon_doc():
    return {
        "type": "Polygon",
        "coordinates": [
            [[100.0, 0.0], [101.0, 0.0], [101.0, 1.0], [100.0, 1.0], [100.0, 0.0]]
        ],
    }


@pytest.fixture
def feature_doc():
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [30.5, 50.5]},
        "properties": {
            "bool": True,
            "string": "foo",
            "double": 2.5,
            "uint": 10,
            "int": -10,
            "null": None,
            "nested": [5, {"foo": "bar"}],
        },
    }


@pytest.fixture
def feature_collection_doc():
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "id": 1234,
                "geometry": {"type": "Point", "coordinates": [1, 2]},
                "properties": {"name": "one"},
            },
            {
                "type": "Feature",
                "id": "abcd",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[1, 2], [3, 4]],
                },
                "properties": None,
            },
        ],
    }
