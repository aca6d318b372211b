"""
RPC examples for the order book and protocol vault.

These examples demonstrate how to interact with the deployed contracts
via Web3 RPC, including:
- Placing and removing maker orders
- Depositing and withdrawing margin
- Inspecting a margin account
"""
