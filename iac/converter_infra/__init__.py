"""Pulumi program for the video converter: one EC2 instance behind an ALB."""
