"""Terraform provider for Unkey."""
