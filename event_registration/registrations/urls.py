REGISTER_URL = "/register"
GET_REGISTRATION_URL = "/registration"
EDIT_REGISTRATION_URL = "/edit"
RESEND_EDIT_LINK_URL = "/resend-edit-link"
