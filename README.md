# s100fc

`s100fc` reads S-100 feature catalogues (XML documents whose root element
is `S100FC:S100_FC_FeatureCatalogue`) into plain Python dataclasses. It
uses only the standard library.

A loaded catalogue holds its header (`name`, `scope`,
`field_of_application`, `version_number`, `version_date`, `producer`),
its `definition_sources`, and the definitions a product specification is
built from:

- `simple_attributes` and `complex_attributes`, with value types, units of
  measure, constraints and listed (enumerated) values;
- `roles`;
- `information_associations` and `feature_associations`;
- `information_types` and `feature_types`, with their attribute,
  information and feature bindings.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from s100fc.catalogue import FeatureCatalogue

catalogue = FeatureCatalogue.from_file("S-101_FC.xml")

depth_area = catalogue.feature_type("DepthArea")
if depth_area is not None:
    print(depth_area.name, depth_area.super_type)
    for binding in depth_area.attribute_bindings:
        print(binding.attribute.reference(), binding.multiplicity.lower)

attribute = catalogue.simple_attribute_by_name("depth range minimum value")
first_feature = catalogue.feature_type_at(0)
```

`FeatureCatalogue.read(path)` fills an existing catalogue instead;
`from_file` creates one and calls it. Both raise `OSError` when the file
cannot be read and `ValueError` when it is not well-formed XML or its root
element is not a feature catalogue.

Every lookup by code (`simple_attribute`, `complex_attribute`, `role`,
`information_association`, `feature_association`, `information_type`,
`feature_type`) has a counterpart that returns the first entry with a
given name (`simple_attribute_by_name`, `feature_type_by_name` and so on).
Each returns `None` when nothing matches. `feature_type_at(index)` returns
the feature type at that position in reading order, or `None`.

### Inherited and derived bindings

While the feature types are loaded, each feature type receives the
bindings of its super type chain: the super type's attribute bindings are
placed before its own, and feature and information bindings it does not
already have are added. Information types keep their own bindings as
read; `InformationTypes.set_association_from_super_type` can be called to
pass them down.

After the whole catalogue is read, `set_full_associations` adds, for every
feature or information binding of a type, a binding to each direct sub
type of the bound type, with the same role and association.

### Building blocks

Each model class has a `load(node)` method that fills it from an
`xml.etree.ElementTree` element. `s100fc.xml_item.parse_element` turns a
string of XML into such an element, keeping prefixed names such as
`S100FC:name` exactly as written:

```python
from s100fc.xml_item import parse_element
from s100fc.measures import Multiplicity
from s100fc.value_types import (
    AttributeValueType,
    attribute_value_type_from_string,
    attribute_value_type_to_string,
)

node = parse_element(
    "<S100FC:multiplicity>"
    "<S100Base:lower>1</S100Base:lower>"
    '<S100Base:upper infinite="true"/>'
    "</S100FC:multiplicity>"
)
multiplicity = Multiplicity()
multiplicity.load(node)
assert multiplicity.lower == 1
assert multiplicity.upper.attribute_value("infinite") == "true"

assert attribute_value_type_from_string("enumeration") is AttributeValueType.ENUMERATION
assert attribute_value_type_to_string(AttributeValueType.REAL) == "real"
```

The modules are `s100fc.xml_item`, `s100fc.codes`, `s100fc.value_types`,
`s100fc.contact`, `s100fc.citation`, `s100fc.definitions`, `s100fc.item`,
`s100fc.measures`, `s100fc.attributes`, `s100fc.bindings`,
`s100fc.object_types` and `s100fc.catalogue`.

## What it does not do

- It only reads catalogues; it cannot write or save them.
- It does not validate a catalogue against the S-100 XML schema, and it
  does not check that codes are among a code list's permitted values.
- Element names are matched by their literal prefixes (`S100FC:`,
  `S100CI:`, `S100Base:`, `S100FD:`); namespace declarations are not
  resolved, so files using other prefixes are not recognised.
- It has no command-line tool.