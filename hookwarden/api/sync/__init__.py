"""Administrative webhook reconciliation resources."""
