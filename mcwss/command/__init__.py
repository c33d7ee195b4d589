"""Builders for command lines and the response types the client sends back."""