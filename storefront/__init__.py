"""Storefront client: persistent cart, pricing, and the checkout and
visit-request submission workflows talking to the Qimma API."""
