"""SurgeWatch command line scripts."""
