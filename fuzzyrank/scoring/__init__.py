"""Composants du moteur : tokenisation, distance, score, classement."""
