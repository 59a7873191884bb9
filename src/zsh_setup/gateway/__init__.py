"""Gateways wrapping every side effect of the provisioner (ABC, real, fake, dry-run)."""
