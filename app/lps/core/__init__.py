"""Core logic for lps: dependency closure, candidates, selection and config."""
