# matches/exceptions.py
from rest_framework import status
from rest_framework.exceptions import APIException


class MatchFull(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Match is full."
    default_code = "match_full"


class AlreadyJoined(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "You have already joined this match."
    default_code = "already_joined"


class NotParticipant(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "You are not a participant of this match."
    default_code = "not_participant"


class MatchNotJoinable(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "This match is not open for joining."
    default_code = "match_not_joinable"


class InvalidTransition(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid status transition."
    default_code = "invalid_transition"


class MatchCreationFailed(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Could not create the match."
    default_code = "match_creation_failed"


class NotMatchCreator(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Only the match creator can do this."
    default_code = "not_match_creator"
