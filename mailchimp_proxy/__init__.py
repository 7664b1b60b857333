"""Mailchimp list/member CRUD proxy."""
