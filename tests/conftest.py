"""
Shared fixtures: a tiny campus map written to disk as OSM XML.
"""

from pathlib import Path

import pytest

from osm import OpenStreetMap, load_map


CAMPUS_OSM = """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="test">
  <node id="1" lat="41.8700" lon="-87.6500"/>
  <node id="2" lat="41.8705" lon="-87.6500"/>
  <node id="3" lat="41.8710" lon="-87.6500"/>
  <node id="4" lat="41.8710" lon="-87.6490"/>
  <node id="5" lat="41.8800" lon="-87.6600"/>
  <node id="6" lat="41.8805" lon="-87.6600"/>
  <node id="7" lat="41.8699" lon="-87.6502"/>
  <node id="8" lat="41.8699" lon="-87.6504"/>
  <node id="9" lat="41.8711" lon="-87.6488"/>
  <node id="10" lat="41.8711" lon="-87.6486"/>
  <node id="11" lat="41.8806" lon="-87.6601"/>
  <node id="12" lat="41.8806" lon="-87.6603"/>
  <way id="100">
    <nd ref="1"/><nd ref="2"/><nd ref="3"/>
    <tag k="highway" v="footway"/>
  </way>
  <way id="101">
    <nd ref="3"/><nd ref="4"/><nd ref="999"/>
    <tag k="area:highway" v="footway"/>
  </way>
  <way id="102">
    <nd ref="5"/><nd ref="6"/>
    <tag k="highway" v="footway"/>
  </way>
  <way id="200">
    <nd ref="7"/><nd ref="8"/>
    <tag k="building" v="university"/>
    <tag k="name" v="Science &amp; Engineering Offices (SEO)"/>
  </way>
  <way id="201">
    <nd ref="9"/><nd ref="10"/>
    <tag k="building" v="university"/>
    <tag k="name" v="Student Center East (SCE)"/>
  </way>
  <way id="202">
    <nd ref="11"/><nd ref="12"/>
    <tag k="building" v="university"/>
    <tag k="name" v="Isolated Hall (ISH)"/>
  </way>
  <way id="203">
    <nd ref="7"/><nd ref="9"/>
    <tag k="building" v="university"/>
  </way>
  <way id="204">
    <nd ref="1"/><nd ref="5"/>
    <tag k="highway" v="residential"/>
  </way>
</osm>
"""


@pytest.fixture
def campus_osm_path(tmp_path: Path) -> Path:
    path = tmp_path / "campus.osm"
    path.write_text(CAMPUS_OSM, encoding="utf-8")
    return path


@pytest.fixture
def campus_map(campus_osm_path: Path) -> OpenStreetMap:
    return load_map(campus_osm_path)
