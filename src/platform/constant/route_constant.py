# API Route Constants

# Base API
API_BASE = '/api'

# User routes
USER_BASE = f'{API_BASE}/user'
USER_CREATE = USER_BASE
USER_LOGIN = f'{USER_BASE}/login'
USER_ME = USER_BASE

# Course routes
COURSE_BASE = f'{API_BASE}/course'
COURSE_CREATE = COURSE_BASE
COURSE_LIST = COURSE_BASE
COURSE_GET = f'{COURSE_BASE}/{{course_id}}'

# Booking routes
BOOKING_BASE = f'{API_BASE}/booking'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST = BOOKING_BASE
BOOKING_MY_BOOKINGS = f'{BOOKING_BASE}/my_booking'
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_UPDATE = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_BY_COURSE = f'{BOOKING_BASE}/course/{{course_id}}'
BOOKING_COURSE_STATUS = f'{BOOKING_BASE}/course/{{course_id}}/status'
