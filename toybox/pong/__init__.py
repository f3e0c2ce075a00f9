"""Pong against a computer-controlled paddle."""