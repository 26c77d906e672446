"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- no backend URL is configured
- we want to test the wizard end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.

Switching to real:
Set NECESSITOUS_API_URL (or api.base_url in config/necessitous_config.yml).
"""
