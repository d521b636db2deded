DEFAULT_PASSWORD = 'P@ssw0rd'

STUDENT_EMAIL = 'student@test.com'
STUDENT_NAME = 'Test Student'

ANOTHER_STUDENT_EMAIL = 'another_student@test.com'
ANOTHER_STUDENT_NAME = 'Another Student'

ADMIN_EMAIL = 'admin@test.com'
ADMIN_NAME = 'Test Admin'

NONEXISTENT_COURSE_ID = 999

DEFAULT_COURSE = {
    'title': 'Python for Beginners',
    'description': 'Variables, control flow and functions.',
    'level': 'Beginner',
    'category': 'Programming',
    'total_seats': 30,
    'duration': '6 weeks',
    'rating': 4.5,
}
