"""Shared configuration, paths, employee directory, security and notifications."""
