"""Worked Python solutions to many of the course's exercises."""