"""Subject Attendance Tracker package.

Organised by feature modules (subjects, analytics, storage) with a thin Flask
controller layer on top of plain service/store classes.
"""
