import pytest

import geospec
from geospec import Feature, FeatureCollection, LineString, Point
from geospec.value import Array, Bool, Float, Int, Null, Object, String, UInt

POINT = {"type": "Point", "coordinates": [1, 2]}


class TestDecodeFeature:
    def test_feature(self, feature_doc):
        res = geospec.convert(feature_doc)
        assert isinstance(res, Feature)
        assert res.geometry == Point(30.5, 50.5)
        assert res.id is None

        props = res.properties
        assert props["bool"] == Bool(True)
        assert props["string"] == String("foo")
        assert props["double"] == Float(2.5)
        assert props["uint"] == UInt(10)
        assert props["int"] == Int(-10)
        assert props["null"] == Null()
        assert props["nested"] == Array([UInt(5), Object({"foo": String("bar")})])

    @pytest.mark.parametrize(
        "raw, typ",
        [(10, UInt), (-10, Int), (2.5, Float)],
    )
    def test_property_number_kinds(self, raw, typ):
        res = geospec.convert(
            {"type": "Feature", "geometry": POINT, "properties": {"a": raw}}
        )
        assert type(res.properties["a"]) is typ
        assert res.properties["a"].value == raw

    def test_null_properties(self):
        res = geospec.convert({"type": "Feature", "geometry": POINT, "properties": None})
        assert res.properties == {}

    def test_missing_properties(self):
        res = geospec.convert({"type": "Feature", "geometry": POINT})
        assert res.properties == {}

    def test_missing_properties_strict(self):
        msg = {"type": "Feature", "geometry": POINT}
        with pytest.raises(geospec.MissingFieldError, match="`properties`"):
            geospec.convert(msg, require_properties=True)

    def test_null_properties_strict(self):
        msg = {"type": "Feature", "geometry": POINT, "properties": None}
        res = geospec.convert(msg, require_properties=True)
        assert res.properties == {}

    @pytest.mark.parametrize("props", [[], "x", 1, True])
    def test_properties_not_object(self, props):
        msg = {"type": "Feature", "geometry": POINT, "properties": props}
        with pytest.raises(geospec.TypeMismatchError) as rec:
            geospec.convert(msg)
        assert rec.value.expected == "object"
        assert rec.value.path == "$.properties"

    @pytest.mark.parametrize(
        "raw, sol",
        [
            (1234, UInt(1234)),
            (-5, Int(-5)),
            (1.5, Float(1.5)),
            ("abcd", String("abcd")),
            ("", String("")),
        ],
    )
    def test_id(self, raw, sol):
        res = geospec.convert({"type": "Feature", "id": raw, "geometry": POINT})
        assert res.id == sol
        assert type(res.id) is type(sol)

    @pytest.mark.parametrize("raw", [None, True, [], {}])
    def test_invalid_id(self, raw):
        msg = {"type": "Feature", "id": raw, "geometry": POINT}
        with pytest.raises(geospec.InvalidIdentifierError) as rec:
            geospec.convert(msg)
        assert rec.value.path == "$.id"

    def test_missing_geometry(self):
        msg = {"type": "Feature", "properties": {}}
        with pytest.raises(geospec.MissingFieldError) as rec:
            geospec.convert(msg)
        assert rec.value.field == "geometry"

    @pytest.mark.parametrize("geom", [None, [1, 2], "Point"])
    def test_geometry_not_object(self, geom):
        msg = {"type": "Feature", "geometry": geom, "properties": {}}
        with pytest.raises(geospec.MalformedGeometryError) as rec:
            geospec.convert(msg)
        assert rec.value.path == "$.geometry"

    def test_invalid_feature_type(self):
        msg = {"type": "feature", "geometry": POINT}
        with pytest.raises(geospec.InvalidFeatureTypeError) as rec:
            geospec.convert(msg, type=Feature)
        assert rec.value.type_name == "feature"

    def test_missing_feature_type(self):
        with pytest.raises(geospec.MissingFieldError, match="`type`"):
            geospec.convert({"geometry": POINT}, type=Feature)

    def test_duplicate_keys_last_wins(self):
        res = geospec.json.decode(
            b'{"type": "Feature", "geometry": {"type": "Point", "coordinates": [1, 2]},'
            b' "properties": {"a": 1, "a": "two"}}'
        )
        assert res.properties == {"a": String("two")}


class TestDecodeFeatureCollection:
    def test_feature_collection(self, feature_collection_doc):
        res = geospec.convert(feature_collection_doc)
        assert isinstance(res, FeatureCollection)
        assert len(res.features) == 2
        one, two = res.features
        assert one.id == UInt(1234)
        assert one.geometry == Point(1.0, 2.0)
        assert one.properties == {"name": String("one")}
        assert two.id == String("abcd")
        assert isinstance(two.geometry, LineString)
        assert two.properties == {}

    def test_empty(self):
        res = geospec.convert({"type": "FeatureCollection", "features": []})
        assert res == FeatureCollection([])

    def test_missing_features(self):
        with pytest.raises(geospec.MissingFieldError, match="`features`"):
            geospec.convert({"type": "FeatureCollection"})

    @pytest.mark.parametrize("features", [{}, None, "x"])
    def test_features_not_array(self, features):
        with pytest.raises(geospec.TypeMismatchError) as rec:
            geospec.convert({"type": "FeatureCollection", "features": features})
        assert rec.value.expected == "array"
        assert rec.value.path == "$.features"

    def test_member_not_object(self):
        with pytest.raises(geospec.TypeMismatchError) as rec:
            geospec.convert({"type": "FeatureCollection", "features": [1]})
        assert rec.value.path == "$.features[0]"

    def test_member_not_a_feature(self):
        msg = {"type": "FeatureCollection", "features": [POINT]}
        with pytest.raises(geospec.InvalidFeatureTypeError) as rec:
            geospec.convert(msg)
        assert rec.value.type_name == "Point"
        assert rec.value.path == "$.features[0].type"

    def test_fails_on_first_error(self):
        msg = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": POINT, "id": None},
                {"type": "Feature"},
            ],
        }
        with pytest.raises(geospec.InvalidIdentifierError):
            geospec.convert(msg)


class TestEncodeFeature:
    def test_feature(self):
        feat = Feature(Point(1, 2), {"a": UInt(1), "b": Array([Null()])}, id=Int(-3))
        assert geospec.to_builtins(feat) == {
            "type": "Feature",
            "id": -3,
            "geometry": {"type": "Point", "coordinates": [1.0, 2.0]},
            "properties": {"a": 1, "b": [None]},
        }

    def test_member_order(self):
        feat = Feature(Point(1, 2), id=String("x"))
        assert list(geospec.to_builtins(feat)) == ["type", "id", "geometry", "properties"]

    def test_no_id_omitted(self):
        assert "id" not in geospec.to_builtins(Feature(Point(1, 2)))

    def test_empty_properties_always_written(self):
        assert geospec.to_builtins(Feature(Point(1, 2)))["properties"] == {}

    @pytest.mark.parametrize("ident", [Bool(True), Null(), Array([])])
    def test_invalid_id_errors(self, ident):
        with pytest.raises(geospec.EncodeError, match="`id`"):
            geospec.to_builtins(Feature(Point(1, 2), id=ident))

    def test_feature_collection(self):
        fc = FeatureCollection([Feature(Point(1, 2)), Feature(Point(3, 4))])
        res = geospec.to_builtins(fc)
        assert res["type"] == "FeatureCollection"
        assert [f["geometry"]["coordinates"] for f in res["features"]] == [
            [1.0, 2.0],
            [3.0, 4.0],
        ]

    def test_roundtrip_ids(self, feature_collection_doc):
        fc = geospec.convert(feature_collection_doc)
        res = geospec.convert(geospec.to_builtins(fc))
        assert res == fc
        assert [type(f.id) for f in res.features] == [UInt, String]

    def test_roundtrip_feature(self, feature_doc):
        feat = geospec.convert(feature_doc)
        assert geospec.to_builtins(feat) == feature_doc
        assert geospec.convert(geospec.to_builtins(feat)) == feat
