"""Rotas de leads (extração, salvamento, envio ao CRM)."""
