from s100fc.bindings import FeatureBinding, InformationBinding, NamedType, ObjectType
from s100fc.xml_item import parse_element

NAMED = (
    '<S100FC:S100_FC_FeatureType isAbstract="true">'
    "<S100FC:name>Depth area</S100FC:name>"
    "<S100FC:code>DepthArea</S100FC:code>"
    '<S100FC:attributeBinding sequential="false">'
    "<S100FC:multiplicity><S100Base:lower>1</S100Base:lower>"
    "<S100Base:upper>1</S100Base:upper></S100FC:multiplicity>"
    '<S100FC:attribute ref="depthRangeMinimumValue"/>'
    "</S100FC:attributeBinding>"
    "<S100FC:attributeBinding>"
    '<S100FC:attribute ref="depthRangeMaximumValue"/>'
    "</S100FC:attributeBinding>"
    "</S100FC:S100_FC_FeatureType>"
)


def test_named_type_reads_item_fields():
    named = NamedType()
    named.load(parse_element(NAMED))
    assert named.name == "Depth area"
    assert named.code == "DepthArea"
    assert named.attribute_value("isAbstract") == "true"


def test_named_type_keeps_attribute_bindings_in_order():
    named = NamedType()
    named.load(parse_element(NAMED))
    refs = [binding.attribute.reference() for binding in named.attribute_bindings]
    assert refs == ["depthRangeMinimumValue", "depthRangeMaximumValue"]
    first = named.attribute_bindings[0]
    assert first.multiplicity.lower == 1
    assert first.attribute_value("sequential") == "false"


def test_named_type_without_abstract_flag_has_no_attributes():
    named = NamedType()
    named.load(parse_element("<T><S100FC:code>X</S100FC:code></T>"))
    assert named.attributes == []
    assert named.attribute_bindings == []


def test_feature_binding_reads_all_parts():
    node = parse_element(
        '<S100FC:featureBinding roleType="association">'
        "<S100FC:multiplicity><S100Base:lower>0</S100Base:lower>"
        '<S100Base:upper infinite="true"/></S100FC:multiplicity>'
        '<S100FC:association ref="StructureEquipment"/>'
        '<S100FC:role ref="theEquipment"/>'
        '<S100FC:featureType ref="Light"/>'
        "</S100FC:featureBinding>"
    )
    binding = FeatureBinding()
    binding.load(node)
    assert binding.attribute_value("roleType") == "association"
    assert binding.multiplicity.lower == 0
    assert binding.multiplicity.upper.attribute_value("infinite") == "true"
    assert binding.association.reference() == "StructureEquipment"
    assert binding.role.reference() == "theEquipment"
    assert binding.feature_type.reference() == "Light"


def test_feature_binding_without_role_type():
    binding = FeatureBinding()
    binding.load(
        parse_element(
            '<S100FC:featureBinding><S100FC:featureType ref="Buoy"/>'
            "</S100FC:featureBinding>"
        )
    )
    assert binding.attributes == []
    assert binding.feature_type.reference() == "Buoy"


def test_information_binding_reads_all_parts():
    node = parse_element(
        '<S100FC:informationBinding roleType="aggregation">'
        '<S100FC:association ref="AdditionalInformation"/>'
        '<S100FC:role ref="theInformation"/>'
        '<S100FC:informationType ref="NauticalInformation"/>'
        "</S100FC:informationBinding>"
    )
    binding = InformationBinding()
    binding.load(node)
    assert binding.attribute_value("roleType") == "aggregation"
    assert binding.association.reference() == "AdditionalInformation"
    assert binding.role.reference() == "theInformation"
    assert binding.information_type.reference() == "NauticalInformation"


def test_object_type_keys_information_bindings_by_target():
    node = parse_element(
        "<T><S100FC:code>Obj</S100FC:code>"
        '<S100FC:informationBinding roleType="association">'
        '<S100FC:informationType ref="Note"/></S100FC:informationBinding>'
        '<S100FC:informationBinding roleType="aggregation">'
        '<S100FC:informationType ref="Authority"/></S100FC:informationBinding>'
        '<S100FC:informationBinding roleType="composition">'
        '<S100FC:informationType ref="Note"/></S100FC:informationBinding>'
        "<S100FC:informationBinding/>"
        "</T>"
    )
    obj = ObjectType()
    obj.load(node)
    assert set(obj.information_bindings) == {"Note", "Authority", ""}
    assert obj.information_bindings["Note"].attribute_value("roleType") == (
        "composition"
    )
    assert obj.information_bindings["Authority"].attribute_value("roleType") == (
        "aggregation"
    )
    assert obj.code == "Obj"