from rest_framework import serializers


class RejectSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=1000)


class ModerationStatsSerializer(serializers.Serializer):
    pending = serializers.IntegerField()
    published = serializers.IntegerField()
    rejected = serializers.IntegerField()
    draft = serializers.IntegerField()
    banned_users = serializers.IntegerField()
