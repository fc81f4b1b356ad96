"""Epoxiron core: domain, application, data, infrastructure and settings layers."""
