"""Shared test data for cleanup tests."""

MARKER = "<objectType>Object</objectType>"

COMPLIANT_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<DataSourceObject xmlns="http://soap.sforce.com/2006/04/metadata">
    <dataSource>Sales</dataSource>
    {MARKER}
</DataSourceObject>
"""

ACTIONABLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<DataSourceObject xmlns="http://soap.sforce.com/2006/04/metadata">
    <dataSource>Sales</dataSource>
    <objectType>Dmo</objectType>
</DataSourceObject>
"""
