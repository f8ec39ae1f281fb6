"""Test suite of earleychart, run through the `test` launch configuration (testing.suite)"""
