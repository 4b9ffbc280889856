"""Build and package a game mod into size-bounded paks and a release zip."""
