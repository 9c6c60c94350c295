# tilesrv

Building blocks for a geographic tile server that publishes data through
the OGC WMS, WMTS and TMS protocols and the OGC API Tiles: configuration
parsing, HTTP request handling, capabilities fragments and INSPIRE
compliance checks. Only the standard library is used.

## Modules

- `tilesrv.inspire`
  - `is_inspire_layer_name(name)` tells whether a name is a harmonised
    INSPIRE layer name (the set is `LAYER_NAMES`).
  - `is_inspire_wms(layer)` and `is_inspire_wmts(layer)` check a layer
    object having `id`, `keywords`, `metadata` and `default_style`
    (whose `identifier` must be `inspire_common:DEFAULT`). WMTS also
    requires at least one metadata link.
- `tilesrv.request`
  - `parse_query(query)` percent-decodes a query string and splits it on
    `&` and `=`; the first occurrence of a key wins.
  - `Request.from_environ(environ, stream)` builds a received request from
    CGI-style variables (`REQUEST_METHOD`, `SCRIPT_NAME`, `QUERY_STRING`),
    reading the body for `POST` and `PUT`, dropping a trailing `/` from the
    path and lower-casing parameter names.
  - `has_query_param`, `get_query_param` (empty string when absent),
    `to_string` and `is_inspire(inspire_default=False)`.
  - `Request.send()` sends an outgoing request with `urllib` (30 s timeout)
    and returns a `RawDataStream` holding the body and its MIME type. It
    raises `RuntimeError` for a received request and `ConnectionError`
    when the transfer fails or the status is not 2xx.
- `tilesrv.metadata`
  - `Metadata.from_json(doc)` reads `format`, `url` and `type`, raising
    `MissingFieldError` naming the faulty field.
  - `add_node_tms`, `add_node_wms`, `add_node_wmts` append elements to an
    `xml.etree.ElementTree.Element`; `to_json_tiles(title, rel)` returns an
    OGC API Tiles link.
  - `add_node(parent, path, value)` adds a value at a dotted path, where a
    `<xmlattr>.name` tail sets an attribute.
- `tilesrv.attribution`
  - `Attribution.from_json(doc)` reads `title`, `url` and an optional
    `logo` (`width`, `height`, `format`, `url`) into a `Logo`.
  - `add_node_tms` and `add_node_wms` append the attribution element.
- `tilesrv.contact`
  - `Contact.from_json(doc)` reads the contact section; `None` gives empty
    fields, wrong types raise `ConfigurationError`.
  - `add_node_wmts(parent)`, `add_node_wms(parent, organization)` and
    `add_node_tms(parent, organization)`.
- `tilesrv.server_config`
  - `ServerConfiguration.load(path)` / `from_json(doc)` read logging
    options (`LogLevel`), cache size and validity, thread count, port,
    backlog, `enabled` and the locations of the services file, layers
    list, styles and tile matrix sets.
  - `add_layer`, `get_layer`, `delete_layer`, `layers_count` manage a
    dictionary of layers keyed by their `id`.
- `tilesrv.services_config`
  - `ServicesConfiguration.load(path)` / `from_json(doc)` read provider,
    site, fee, access constraint, the contact and an optional CRS
    equivalences file.
  - `load_crs_equivalences(path)`, `get_equals_crs(crs)`,
    `handle_crs_equivalences()` and `are_crs_equals(crs1, crs2)`. Codes
    are compared upper-cased. CRS codes are accepted by `crs_validator`,
    which by default only checks the `AUTHORITY:CODE` shape.

Invalid configuration raises `ConfigurationError` (a `ValueError`)
describing the faulty field.

## Example

```python
from tilesrv.inspire import is_inspire_layer_name
from tilesrv.server_config import ServerConfiguration

assert is_inspire_layer_name("CP.CadastralParcel")

config = ServerConfiguration.load("server.json")
print(config.socket, config.threads_count, config.layers_count())
```

## What this package does not do

It does not run a server: there is no listening socket, worker loop or
request routing, and no command-line program. It does not load layers,
pyramids, styles or tile matrix sets; it only stores the paths given in
the configuration. The services configuration does not build the WMS,
WMTS, TMS, OGC API Tiles, health or admin services, and CRS codes are not
checked against a projection library.

## Tests

```
pip install -e .[test]
pytest
```