"""littleutils test suite.

Folder taxonomy
- unit/         : Fast checks of a single module/function; scratch files only under tmp_path.
- integration/  : Real filesystem behavior of the file helpers.
- e2e/          : The ``littleutils`` command line driven through CliRunner.
- helpers/      : Shared utilities (no tests here).

Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
