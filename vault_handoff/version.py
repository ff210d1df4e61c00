"""Vault Handoff Meta information.
   Vault Handoff grants freshly bootstrapped nodes access to encrypted vault items.
"""
__title__ = 'vault_handoff'
__description__ = (
   'Vault Handoff grants freshly bootstrapped nodes access '
   'to encrypted vault items.'
)
__version__ = '0.1.0'
__copyright__ = 'Copyright (c) 2023 Jesus Lara'
__author__ = 'Jesus Lara'
__author_email__ = 'jesuslarag@gmail.com'
__license__ = 'Apache-2.0'
__url__ = 'https://github.com/phenobarbital/vault-handoff'
